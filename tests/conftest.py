import matplotlib

# Tests never open real windows.
matplotlib.use("Agg")

from pairvis.cli import main


main()

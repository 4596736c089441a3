from rectgrid.cli import main

main()

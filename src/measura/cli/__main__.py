from measura.cli.main import main

main()

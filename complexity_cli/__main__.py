from complexity_cli.cli.app import main

main()

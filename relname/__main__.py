from relname.cli.app import main

main()

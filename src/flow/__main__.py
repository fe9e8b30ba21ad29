from flow.cli.cli import main

main()

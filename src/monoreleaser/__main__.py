from monoreleaser.cli.app import main

main()

from bookit.cli import main

main()

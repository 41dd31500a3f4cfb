from fsnav.cli import main

main()

from gobinary.cli import main

main()

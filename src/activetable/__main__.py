from activetable.cli import main

main()

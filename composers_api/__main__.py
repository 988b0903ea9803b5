from composers_api.cli import main

main()

from pathextract.cli import main

main()

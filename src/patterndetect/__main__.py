from patterndetect.cli.main import main

main()

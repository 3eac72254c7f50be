from weather_cli.cli import main

main()

from terminai.cli import main

main()

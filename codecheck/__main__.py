from codecheck.main import main

main()

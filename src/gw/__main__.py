from gw.main import main

main()

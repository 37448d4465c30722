from fruitmatch.main import main

main()

from neonflap.main import main

main()

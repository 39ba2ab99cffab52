from gombaszedo.app import main

main()

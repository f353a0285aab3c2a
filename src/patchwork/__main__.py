from patchwork.app import main

main()

from termimage.cli import main

main()

from board2048.play import main

main()

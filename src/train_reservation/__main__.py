from train_reservation.reservation.handlers.console import main

main()

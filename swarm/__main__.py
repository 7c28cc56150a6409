from swarm.play import main

main()

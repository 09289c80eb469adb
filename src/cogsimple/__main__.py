from cogsimple.cli import main

main()

from mandataire.cli import main

main()

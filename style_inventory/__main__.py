from style_inventory.cli import main

main()

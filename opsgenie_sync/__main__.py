from opsgenie_sync.main import main

main()

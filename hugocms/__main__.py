from hugocms.app import main

main()

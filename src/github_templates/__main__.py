from github_templates import main

main()

from .cli import main

main()
# EOF

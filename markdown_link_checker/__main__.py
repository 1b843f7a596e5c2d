import sys

from markdown_link_checker.main import main

sys.exit(main())

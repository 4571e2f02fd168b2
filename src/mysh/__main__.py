import sys

from mysh.main import main

sys.exit(main())

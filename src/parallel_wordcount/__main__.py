import sys

from parallel_wordcount.cli import main

sys.exit(main())

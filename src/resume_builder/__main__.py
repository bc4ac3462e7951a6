import sys

from resume_builder import main

sys.exit(main())

import sys

from .font_conv import main

sys.exit(main())

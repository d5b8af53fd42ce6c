import sys

from property_animation.app import main

sys.exit(main())

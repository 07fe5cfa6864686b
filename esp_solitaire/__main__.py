import sys

from esp_solitaire.main import main

sys.exit(main())

import sys

from seismic_fourier.cli import main

sys.exit(main())

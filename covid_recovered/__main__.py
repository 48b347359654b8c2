import sys

from covid_recovered.main import main

sys.exit(main())

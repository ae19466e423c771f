"""
elpais_opinion/__main__.py
--------------------------
Allows ``python -m elpais_opinion`` with the same options as elpais-opinion.
"""
import sys

from .cli import main

sys.exit(main())

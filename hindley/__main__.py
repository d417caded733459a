"""
Same as the `hindley` console script:

    py -m hindley identity const
"""
from .cmdline import main

main()

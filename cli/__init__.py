"""
NFT Collection Wizard CLI

Click-based launcher and terminal prompt driver for the collection wizard.
"""

__version__ = "0.1.0"

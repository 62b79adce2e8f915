"""
NFT Collection Wizard CLI Commands Package

Command modules for the NFT Collection Wizard CLI.
"""

__all__ = ['init_config']

"""
Passkey Grid renders the markdown tables of a passkey support directory
(websites, platforms, developer tools and security keys) into responsive
CSS-grid HTML fragments.
"""

__version__ = "1.0"

"""Domain packages for accname.

- shared: errors and text helpers used everywhere
- element: ElementView adapters over bs4 and virtual trees
- style: author CSS as far as name computation needs it
- role: ARIA role registry and classifier
- naming: accessible name and description computation
"""

"""util package.

Modules:
    - exceptions: The error taxonomy of ecarith.
    - utility_functions: Helpers shared by the arithmetic modules, such as the binary expansion of scalars.
"""

"""
The Cipher Forge -- Terminal Cryptography Simulator
=====================================================

Interactive tool for encrypting text with classical substitution
ciphers. Pick a cipher from the menu, enter a message and a key, and the
forge validates the input, encrypts it and shows the result.

Modules:
    - cipherforge.algorithms: Caesar and Vigenere ciphers
    - cipherforge.core.models: Result model and enumerations
    - cipherforge.core.validation: Key syntax checks
    - cipherforge.core.registry: Selection token -> algorithm lookup
    - cipherforge.core.session: Interactive menu loop with retry policy
    - cipherforge.parsers: Line-oriented input reading
    - cipherforge.output: Rich console display
    - cipherforge.cli: Click-based command-line entry point

These ciphers are for teaching and play; they offer no real security.
"""

__version__ = "1.0.0"
__tool_name__ = "cipherforge"

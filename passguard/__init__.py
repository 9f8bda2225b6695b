"""
PassGuard -- Credential Validation and Password Strength Toolkit
=================================================================

Validates registration and sign-in forms, classifies password strength
with a deterministic heuristic, and generates policy-compliant random
passwords.

Modules:
    - passguard.core.engine: Central orchestrator
    - passguard.core.models: Pydantic data models
    - passguard.core.constants: Credential policy constants
    - passguard.analyzers: Pattern detector and strength classifier
    - passguard.validators: Declarative field rules and form validator
    - passguard.generators: Password generator and randomness sources
    - passguard.output: Console and report output
    - passguard.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "passguard"

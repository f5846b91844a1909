"""
Rift Core Test Suite
====================

Test Organization
-----------------
- tests/unit/          : Fast, pure tests of one module each
- tests/integration/   : Whole zone runs across decay, encounters and loot

Testing Philosophy
------------------
- Unit tests: seeded streams or scripted draws, exact expected values
- Integration tests: determinism and snapshot continuation end to end
- Use pytest markers to categorize and selectively run tests
- Follow AAA pattern: Arrange, Act, Assert
"""

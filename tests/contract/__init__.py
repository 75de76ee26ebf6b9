"""Contract tests.

Behavior every `ImageSource` implementation must honor, written once and run
against each adapter through parametrized fixtures. Assert only the public
contract (inputs, outputs, effects), never internals.
"""

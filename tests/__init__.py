"""PLANESTORE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Layers wired together through `bootstrap`.
- functional/   : User-visible CLI behavior (help, version).
- e2e/          : Full CLI runs, including logging and the flight recorder.
- contract/     : Shared behavior enforced across every `ImageSource` adapter.
- fixtures/     : Shared fakes and pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fake image sources over mocks.
- Functional and e2e tests assert user-observable output, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""

"""uploadref test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every Storage implementation.
- integration/  : Real filesystem interactions (LocalStorage, bootstrap).
- e2e/          : The command line driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""

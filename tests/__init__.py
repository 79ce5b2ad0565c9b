"""Test package for earlylog.

Test Organisation
-----------------
- Unit tests (test_*.py): levels, the record buffer, destinations, the
  handler state machine, the process-wide manager, configuration, and the
  stdlib bridge.
- BDD tests (features/): Gherkin feature files with step definitions in
  steps/.
- Shared fixtures (conftest.py): ``_clean_logging_manager`` uninstalls any
  handler around every test.
- Shared helpers (helpers.py): failing streams and stderr capture helpers.

Running Tests
-------------
Run all tests::

    pytest tests/

Run BDD tests only::

    pytest tests/steps/
"""

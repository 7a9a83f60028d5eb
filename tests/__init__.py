"""form-state test suite.

- test_form_state.py: value store, dirty and touched tracking, listeners
- test_bindings.py: text/email/select, radio, checkbox and raw adapters
- test_hook.py: use_form_state facade and end-to-end form scenarios
- test_comparison.py: form truthiness and structural equality
- test_settings.py: .form-state.yaml loading and validation
- test_logging.py: form logger context and write records
- test_events.py: change events and exception formatting
"""

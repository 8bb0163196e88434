# Pump Master QA Suite
# Tests organized by type:
# - unit/: Offline tests for the pumpmaster_qa support package
# - api/: Tests against the live REST API
# - web/: Browser tests against the live web application

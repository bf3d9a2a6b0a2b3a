"""
Test suite for the match betting services.

Test Structure:
    - conftest.py: Mock repositories, factories and wired services
    - test_models.py / test_settlement.py: Models and bet settlement
    - test_*_service.py: Service layer against mocked repositories
    - test_repositories.py: Repositories against a mocked Motor collection
    - test_match_client.py: Championship client over httpx.MockTransport
    - test_api.py / test_cli.py: HTTP applications and CLI

Running Tests:
    pytest                          # Run all tests
    pytest -v                       # Verbose output
    pytest tests/test_bet_service.py
"""

from .client_creator import (
    create_test_client,
    TEST_BASE_URL,
    TEST_API_KEY,
    TEST_TOKEN,
    TEST_IDENTITY,
    TEST_ACCOUNT,
    TEST_FORWARDER,
    TEST_RELAYER,
    TEST_TX_HASH,
    TEST_TRACKING_ID,
)

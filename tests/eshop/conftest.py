import pytest


@pytest.fixture(scope="session")
def _eshop_domain():
    """Initialize the eshop domain once per session."""
    from eshop.domain import eshop

    eshop.init()
    return eshop


@pytest.fixture(scope="session", autouse=True)
def setup_db(_eshop_domain):
    from eshop.utils.db import drop_db, setup_db

    setup_db(_eshop_domain)

    yield

    drop_db(_eshop_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_eshop_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _eshop_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def register_good():
    """Register a catalog good through the command pipeline and return its id."""
    from protean import current_domain

    from eshop.good.catalogue import RegisterGood

    def _register(title="Juice", price=2.0, quantity=1, description=None):
        return current_domain.process(
            RegisterGood(
                title=title,
                price=price,
                quantity=quantity,
                description=description or f"This is a {title.lower()}",
            ),
            asynchronous=False,
        )

    return _register

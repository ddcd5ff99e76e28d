import os

import pytest
from protean import current_domain


@pytest.fixture(scope="session")
def _bookmarket_domain(request):
    """Initialize the bookmarket domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from bookmarket.domain import bookmarket

    bookmarket.init()
    return bookmarket


@pytest.fixture(scope="session", autouse=True)
def setup_db(_bookmarket_domain):
    from bookmarket.utils.db import drop_db, setup_db

    setup_db(_bookmarket_domain)

    yield

    drop_db(_bookmarket_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_bookmarket_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _bookmarket_domain.domain_context()
    ctx.push()

    yield

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Seed data, written through the same commands the API uses
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_shop():
    from bookmarket.shop.registration import RegisterShop
    from bookmarket.shop.verification import VerifyShop

    def _register(phone="9800000001", upi_id="booksville@upi", verified=True, city="Pune", shop_name="Booksville"):
        shop_id = current_domain.process(
            RegisterShop(
                shop_name=shop_name,
                owner_name="Meera Joshi",
                phone=phone,
                password="shop-pass",
                address="4 Station Road",
                city=city,
                upi_id=upi_id,
            ),
            asynchronous=False,
        )
        if verified:
            current_domain.process(VerifyShop(shop_id=shop_id, verified=True), asynchronous=False)
        return shop_id

    return _register


@pytest.fixture()
def register_student():
    from bookmarket.student.registration import RegisterStudent

    def _register(phone="9700000001", name="Asha Rao", address="Hostel B, Room 12"):
        return current_domain.process(
            RegisterStudent(name=name, phone=phone, password="student-pass", address=address, grade="11"),
            asynchronous=False,
        )

    return _register


@pytest.fixture()
def list_book():
    from bookmarket.book.management import AddBook

    def _list(shop_id, book_name="NCERT Physics Part 1", price=250.0, stock=3, grade="11", subject="Physics",
              condition="new"):
        return current_domain.process(
            AddBook(
                shop_id=shop_id,
                book_name=book_name,
                price=price,
                stock=stock,
                grade=grade,
                subject=subject,
                condition=condition,
            ),
            asynchronous=False,
        )

    return _list


@pytest.fixture()
def shop_id(register_shop):
    return register_shop()


@pytest.fixture()
def student_id(register_student):
    return register_student()


@pytest.fixture()
def book_id(list_book, shop_id):
    return list_book(shop_id)


@pytest.fixture()
def serve_stale_book(monkeypatch):
    """Make the next load of a book hand back an older copy of it.

    Later loads read the store again. Returns the list of copies served.
    """
    from bookmarket.book.book import Book

    served = []

    def _serve(stale):
        repo_cls = type(current_domain.repository_for(Book))
        original_get = repo_cls.get

        def get(self, identifier):
            if not served and str(identifier) == str(stale.id):
                served.append(stale)
                return stale
            return original_get(self, identifier)

        monkeypatch.setattr(repo_cls, "get", get)
        return served

    return _serve

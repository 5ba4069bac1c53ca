import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "lightbnb_test.db"
    # Point the app at this temp DB
    os.environ["LIGHTBNB_DB_PATH"] = str(path)
    from lightbnb.services.schema_svc import ensure_schema
    ensure_schema(str(path))
    return str(path)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Safety: only ever wipe the temp DB
    assert os.environ.get("LIGHTBNB_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    tables = [
        "property_reviews",
        "reservations",
        "properties",
        "users",
        "operation_log",
    ]
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in tables:
            conn.execute(f"DELETE FROM {t}")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def seed(tmp_db_path):
    """Two hosts, one guest, three listings with reviews, past and future stays."""
    conn = sqlite3.connect(tmp_db_path)
    try:
        conn.executescript("""
            INSERT INTO users (id, name, email, password) VALUES
              (1, 'Eva Stanley', 'eva@example.com', 'pw'),
              (2, 'Louisa Meyer', 'louisa@example.com', 'pw'),
              (3, 'Dominic Parks', 'dominic@example.com', 'pw');

            INSERT INTO properties (id, owner_id, title, thumbnail_photo_url, cover_photo_url,
                cost_per_night, country, street, city, province, post_code) VALUES
              (1, 1, 'Speed lamp', 't', 'c', 9300, 'Canada', '536 Namsub', 'Vancouver', 'BC', '28142'),
              (2, 1, 'Blank corner', 't', 'c', 15000, 'Canada', '651 Nami', 'North Vancouver', 'BC', '81059'),
              (3, 2, 'Habit mix', 't', 'c', 34000, 'Canada', '1650 Hejto', 'Calgary', 'AB', '29045');

            INSERT INTO reservations (id, start_date, end_date, property_id, guest_id) VALUES
              (1, '2018-09-11', '2018-09-26', 2, 3),
              (2, '2019-01-04', '2019-02-01', 1, 3),
              (3, '2021-10-01', '2021-10-14', 3, 3),
              (4, '2099-01-01', '2099-01-05', 1, 3);

            INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating, message) VALUES
              (3, 1, 2, 5, 'great'),
              (3, 1, 4, 3, 'ok'),
              (3, 2, 1, 4, 'nice'),
              (3, 3, 3, 2, 'meh');
        """)
        conn.commit()
    finally:
        conn.close()

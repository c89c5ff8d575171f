import seed
from onboarding.models.user import User


def test_seed_creates_active_admin_once(db, monkeypatch):
    monkeypatch.setattr(seed.settings, "SEED_ADMIN_EMAIL", "admin@x.com")
    monkeypatch.setattr(seed.settings, "SEED_ADMIN_PASSWORD", "admin-pass")

    seed.run_seed()
    seed.run_seed()

    admins = db.query(User).all()
    assert len(admins) == 1
    assert admins[0].role == "ADMIN"
    assert admins[0].status == "ACTIVE"
    assert admins[0].password != "admin-pass"


def test_seed_skipped_without_credentials(db, monkeypatch):
    monkeypatch.setattr(seed.settings, "SEED_ADMIN_EMAIL", None)

    seed.run_seed()

    assert db.query(User).count() == 0

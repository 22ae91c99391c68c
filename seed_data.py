from sqlmodel import Session, select
from app.db.session import engine, create_db_and_tables
from app.models.item import Item

STARTER_ITEMS = [
    Item(id="apple", name="Apple", price=1),
    Item(id="bread", name="Bread", price=2),
    Item(id="milk", name="Milk", price=3),
]

def seed_items():
    print("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        # Check if items already exist to avoid duplicates
        existing_items = session.exec(select(Item)).all()
        if existing_items:
            print(f"Database already contains {len(existing_items)} items. Skipping seed.")
            return

        print("Seeding starter catalog...")
        for item in STARTER_ITEMS:
            session.add(item)

        session.commit()
        print(f"Successfully seeded {len(STARTER_ITEMS)} items!")

if __name__ == "__main__":
    seed_items()

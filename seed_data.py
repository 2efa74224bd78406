from sqlmodel import Session, select
from app.core.logging import setup_logging, get_logger
from app.db.session import engine, create_db_and_tables
from app.models.category import Category
from app.models.product import Product

logger = get_logger("seed_data")

CATEGORIES = [
    ("Laptops", "Portable computers"),
    ("Peripherals", "Keyboards, mice and other accessories"),
    ("Displays", "Monitors and screens"),
]

PRODUCTS = [
    # name, category, price, stock_count, brand, is_available
    ("UltraBook Pro 14", "Laptops", 1299.99, 15, "Nordtech", True),
    ("Workstation X17", "Laptops", 2499.00, 5, "Nordtech", True),
    ("Mechanical Keyboard K8", "Peripherals", 89.99, 120, "Keyforge", True),
    ("Wireless Mouse M3", "Peripherals", 24.99, 200, "Keyforge", True),
    ("27\" 4K Monitor", "Displays", 399.00, 30, "Visionic", True),
    ("34\" Curved Monitor", "Displays", 649.50, 0, "Visionic", False),
]

def seed():
    logger.info("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        # Check if products already exist to avoid duplicates
        existing_products = session.exec(select(Product)).all()
        if existing_products:
            logger.info("Database already contains %s products. Skipping seed.", len(existing_products))
            return

        categories = {}
        for name, description in CATEGORIES:
            category = Category(name=name, description=description)
            session.add(category)
            categories[name] = category
        session.commit()

        for name, category, price, stock_count, brand, is_available in PRODUCTS:
            session.add(Product(
                name=name,
                category=category,
                price=price,
                stock_count=stock_count,
                brand=brand,
                is_available=is_available,
                category_id=categories[category].id
            ))

        session.commit()
        logger.info("Seeded %s categories and %s products", len(CATEGORIES), len(PRODUCTS))

if __name__ == "__main__":
    setup_logging()
    seed()

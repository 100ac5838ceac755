# eshop_product/data/seed.py
from eshop_product.data.database import SessionLocal, init_db
from eshop_product.data.models.product import ProductModel
from eshop_product.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS_SEED_DATA = [
    ("Socks", 5),
    ("Keyboard", 1),
    ("Mouse", 1),
    ("Monitor", 2),
]


def seed():
    db = SessionLocal()
    try:
        with db.begin():
            # not forcing: only seed if empty
            if db.query(ProductModel).first():
                logger.info("Products already present, skipping seed")
                return
            db.add_all([ProductModel(name=name, type=type_) for name, type_ in PRODUCTS_SEED_DATA])
        logger.info(f"Seeded {len(PRODUCTS_SEED_DATA)} products")
    finally:
        db.close()


if __name__ == "__main__":
    init_db()
    seed()

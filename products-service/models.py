from typing import List
from pydantic import BaseModel

PLACEHOLDER_IMAGE = "/placeholder.png"


class Product(BaseModel):
    id: int
    name: str
    price: float
    description: str
    image: str


# Catalogue initial, rechargé à chaque démarrage (pas de persistance)
SEED_PRODUCTS: List[Product] = [
    Product(
        id=1,
        name="ZenoFit Tracker",
        price=99.99,
        description="Monitor your heart rate, calories, steps, and more with this ultimate fitness tracker. It syncs with your smartphone and gives you personalized feedback and coaching. ZenoFit Tracker is your best companion for your fitness goals.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=2,
        name="Airy Purifier Mini",
        price=79.99,
        description="Clean the air in your home or office with this compact and powerful air purifier. It removes dust, pollen, smoke, odors, and bacteria. It also has a HEPA filter that lasts up to 6 months. Airy Purifier Mini is the device that breathes fresh air into your life.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=3,
        name="Zenith Wireless Headphones",
        price=199.99,
        description="Enjoy high-quality sound and noise cancellation with these premium headphones. They have a sleek design and a comfortable fit. They also have a long battery life and a built-in microphone. Zenith Wireless Headphones are the ultimate sound experience for your ears.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=4,
        name="Hydrate Smart Bottle",
        price=39.99,
        description="Track your water intake and remind yourself to drink more with this smart water bottle. It connects to your smartphone and shows you your hydration level and goals. It also glows in different colors to motivate you. Hydrate Smart Bottle is the bottle that keeps you hydrated and healthy.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=5,
        name="Sleepy Weighted Mask",
        price=29.99,
        description="Fall asleep faster and deeper with this sleep mask. It has a weighted design that applies gentle pressure to your eyes and temples. It also has a lavender scent that relaxes your mind and body. Sleepy Weighted Mask is the mask that helps you sleep better.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=6,
        name="FlexiFit Yoga Mat",
        price=49.99,
        description="Practice yoga with the perfect balance of comfort and stability with this yoga mat. It has a non-slip surface that grips the floor and prevents sliding. It also has a cushioned layer that supports your joints and spine. FlexiFit Yoga Mat is the mat that enhances your yoga experience.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=7,
        name="Glow Ionic Dryer",
        price=89.99,
        description="Dry your hair faster and smoother than ever before with this hair dryer. It uses ionic technology to reduce frizz and static electricity. It also has a ceramic coating that protects your hair from heat damage. Glow Ionic Dryer is the dryer that gives your hair a healthy glow.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=8,
        name="Breathe Aroma Diffuser",
        price=49.99,
        description="Fill your space with soothing scents and mood lighting with this aromatherapy diffuser. It comes with 6 different essential oils that have various benefits for your health and well-being. It also has a timer and a mist mode. Breathe Aroma Diffuser is the device that creates a relaxing atmosphere for you.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=9,
        name="LumiSkin LED Device",
        price=149.99,
        description="Rejuvenate your skin with this revolutionary device that uses LED light therapy. It reduces wrinkles, fine lines, dark spots, and acne. It also boosts collagen and elastin production. LumiSkin LED Device is the secret to a younger-looking skin.",
        image=PLACEHOLDER_IMAGE,
    ),
    Product(
        id=10,
        name="FlexiFit Yoga Ball",
        price=39.99,
        description="Improve your balance and flexibility with this high-quality yoga ball. It is made of anti-burst PVC material that can support up to 2200 lbs. It also comes with a pump and a workout guide. FlexiFit Yoga Ball is the perfect tool for your yoga practice and physical therapy.",
        image=PLACEHOLDER_IMAGE,
    ),
]


def seed_products() -> List[Product]:
    """Copie fraîche du catalogue initial (un store ne partage jamais ses objets)"""
    return [p.model_copy() for p in SEED_PRODUCTS]

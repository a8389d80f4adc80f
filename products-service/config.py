import os
from dotenv import load_dotenv

# Chargement des variables d'environnement
load_dotenv()

SERVICE_NAME = "products-service"
SERVICE_VERSION = "0.2"

HOST = "0.0.0.0"
PORT = 3002

# Taille max du body en mémoire (256k)
MAX_PAYLOAD_SIZE = 262_144

# Seul réglage piloté par l'environnement: le filtrage des logs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

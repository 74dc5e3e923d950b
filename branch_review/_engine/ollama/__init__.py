from .model import get_models, display_models, generate_review

"""Sweet domain constants."""

from django.db import models


class SweetCategory(models.TextChoices):
    CHOCOLATES = "chocolates", "Chocolates"
    CANDIES = "candies", "Candies"
    COOKIES = "cookies", "Cookies"
    CAKES = "cakes", "Cakes"
    PASTRIES = "pastries", "Pastries"
    ICE_CREAM = "ice-cream", "Ice Cream"
    TRADITIONAL = "traditional", "Traditional"


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
IMAGE_URL_MAX_LENGTH = 500

# Prices are stored exactly as given, with at most two fraction digits
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2

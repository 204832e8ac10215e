from django.apps import AppConfig


class AddressesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'lookup_tables.addresses'
    label = 'addresses'
    verbose_name = 'Addresses (lookup tables example)'

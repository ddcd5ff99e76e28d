"""RegisterShop: sign a new shop up, unapproved until an admin verifies it."""

from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket, logger
from bookmarket.shop.shop import Shop


@bookmarket.command(part_of="Shop")
class RegisterShop:
    shop_name = String(required=True, max_length=200)
    owner_name = String(required=True, max_length=200)
    phone = String(required=True, max_length=20)
    password = String(required=True, max_length=128)
    address = Text()
    city = String(max_length=100)
    upi_id = String(max_length=100)


@bookmarket.command_handler(part_of=Shop)
class RegisterShopHandler:
    @handle(RegisterShop)
    def register_shop(self, command):
        repo = current_domain.repository_for(Shop)
        if repo.find_by_phone(command.phone) is not None:
            raise ValidationError({"phone": ["Phone number already registered"]})

        shop = Shop.register(
            shop_name=command.shop_name,
            owner_name=command.owner_name,
            phone=command.phone,
            password=command.password,
            address=command.address,
            city=command.city,
            upi_id=command.upi_id,
        )
        repo.add(shop)
        logger.info("Shop registered", shop_id=str(shop.id), city=shop.city)
        return str(shop.id)

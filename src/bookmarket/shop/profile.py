"""Shop profile edits and the UPI handle used for payment links."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket
from bookmarket.shop.shop import Shop


@bookmarket.command(part_of="Shop")
class UpdateShopProfile:
    shop_id = Identifier(required=True)
    shop_name = String(max_length=200)
    owner_name = String(max_length=200)
    address = Text()
    city = String(max_length=100)
    logo_url = String(max_length=500)
    banner_url = String(max_length=500)


@bookmarket.command(part_of="Shop")
class SetUpiHandle:
    shop_id = Identifier(required=True)
    upi_id = String(max_length=100)


@bookmarket.command_handler(part_of=Shop)
class ShopProfileHandler:
    @handle(UpdateShopProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.update_profile(
            shop_name=command.shop_name,
            owner_name=command.owner_name,
            address=command.address,
            city=command.city,
            logo_url=command.logo_url,
            banner_url=command.banner_url,
        )
        repo.add(shop)

    @handle(SetUpiHandle)
    def set_upi_handle(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.set_upi_handle(command.upi_id)
        repo.add(shop)

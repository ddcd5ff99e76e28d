"""VerifyShop: admin approval gate for listing visibility."""

from protean.fields import Boolean, Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from bookmarket.domain import bookmarket, logger
from bookmarket.shop.shop import Shop


@bookmarket.command(part_of="Shop")
class VerifyShop:
    shop_id = Identifier(required=True)
    verified = Boolean(required=True)
    admin_note = Text()


@bookmarket.command_handler(part_of=Shop)
class VerifyShopHandler:
    @handle(VerifyShop)
    def verify_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_id)
        shop.set_verification(command.verified, admin_note=command.admin_note)
        repo.add(shop)
        logger.info("Shop verification changed", shop_id=str(shop.id), verified=shop.verified)

from barcodes import CodeRegistry, InternalCodeGenerator, Symbology, detect
from services.barcode_service import (
    DUPLICATE_BARCODE, PRODUCT_NOT_FOUND, BarcodeService,
)
from services.products_service import ProductsService
from barcodes.formats import EMPTY_BARCODE_ERROR, UNRECOGNIZED_FORMAT_ERROR
from tests.factories import ProductFactory


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def randrange(self, _stop):
        return self.value


def test_lookup_trims_and_finds_active_product(session):
    product = ProductFactory(barcode="5901234123457")
    result = BarcodeService.lookup(session, "  5901234123457 ")
    assert result.found
    assert result.product.id == product.id


def test_lookup_ignores_inactive_products(session):
    ProductFactory(barcode="96385074", is_active=False)
    result = BarcodeService.lookup(session, "96385074")
    assert not result.found
    assert result.error == PRODUCT_NOT_FOUND


def test_lookup_empty(session):
    result = BarcodeService.lookup(session, "   ")
    assert not result.found
    assert result.error == EMPTY_BARCODE_ERROR


def test_uniqueness(session):
    product = ProductFactory(barcode="ABC123")
    assert not BarcodeService.is_unique(session, "ABC123")
    assert BarcodeService.is_unique(session, "ABC123", exclude_product_id=product.id)
    assert BarcodeService.is_unique(session, "XYZ789")
    assert not BarcodeService.is_unique(session, "")


def test_assign_validates_and_stores(session):
    product = ProductFactory(barcode=None)
    result = BarcodeService.assign(session, product.id, " 012345678905 ")
    assert result.success
    assert result.barcode == "012345678905"
    assert ProductsService.get(session, product.id).barcode == "012345678905"


def test_assign_rejections(session):
    taken = ProductFactory(barcode="TAKEN-1")
    other = ProductFactory(barcode=None)

    assert BarcodeService.assign(session, "", "X").error == "product id must not be empty"
    assert BarcodeService.assign(session, other.id, " ").error == EMPTY_BARCODE_ERROR
    assert BarcodeService.assign(session, other.id, "Ünïcode").error == UNRECOGNIZED_FORMAT_ERROR
    assert BarcodeService.assign(session, "missing", "ABC").error == PRODUCT_NOT_FOUND
    assert BarcodeService.assign(session, other.id, "TAKEN-1").error == DUPLICATE_BARCODE

    # Re-assigning a product's own barcode is allowed
    assert BarcodeService.assign(session, taken.id, "TAKEN-1").success


def test_generate_and_assign(session):
    product = ProductFactory(barcode=None)
    gen = InternalCodeGenerator(CodeRegistry())
    result = BarcodeService.generate_and_assign(session, product.id, gen)
    assert result.success
    assert detect(result.barcode) == Symbology.INTERNAL
    assert ProductsService.get(session, product.id).barcode == result.barcode
    assert result.barcode in gen.registry


def test_generate_skips_codes_already_in_database(session):
    ProductFactory(barcode="INT0000100001")
    product = ProductFactory(barcode=None)
    draws = iter([1, 2])

    class Scripted:
        def randrange(self, _stop):
            return next(draws)

    gen = InternalCodeGenerator(CodeRegistry(), clock=lambda: 1000, rng=Scripted())
    result = BarcodeService.generate_and_assign(session, product.id, gen)
    assert result.barcode == "INT0000100002"


def test_generate_for_unknown_product(session):
    gen = InternalCodeGenerator(CodeRegistry(), rng=FixedRandom(1))
    result = BarcodeService.generate_and_assign(session, "nope", gen)
    assert not result.success
    assert result.error == PRODUCT_NOT_FOUND
    assert len(gen.registry) == 0


def test_products_service_create_and_list(session):
    ProductsService.create(session, {"name": "Beras 5kg", "price": 72000})
    ProductsService.create(session, {"name": "Minyak Goreng", "price": 18000,
                                     "barcode": "8991234567891"})
    ProductsService.create(session, {"name": "Old stock", "price": 1, "is_active": False})
    session.commit()

    rows, total = ProductsService.list_active(session)
    assert total == 2
    assert [p.name for p in rows] == ["Beras 5kg", "Minyak Goreng"]

    rows, total = ProductsService.list_active(session, q="8991")
    assert [p.name for p in rows] == ["Minyak Goreng"]

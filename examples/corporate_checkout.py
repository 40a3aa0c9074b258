"""
Corporate checkout - the domain model used without the demo sequence
"""

from minimarket import (
    Cart,
    ConsoleSink,
    CorporateCustomer,
    FixedDiscount,
    Order,
    OrderStatus,
    Product,
    TransferPayment,
)


def main():
    sink = ConsoleSink()

    customer = CorporateCustomer(10, "Mehmet Kaya", "Kaya Gıda A.Ş.")
    customer.describe(sink)

    cart = Cart(sink=sink)
    for product in (Product(1, "Elma", 10), Product(2, "Armut", 15), Product(3, "Ayva", "7.5")):
        cart.add_item(product)

    amount = FixedDiscount(5).apply(cart.total())
    receipt = TransferPayment().settle(amount, sink)

    order = Order(42, cart, customer=customer, sink=sink)
    order.record_payment(receipt)
    order.update_status(OrderStatus.CONFIRMED)
    order.update_status(OrderStatus.DELIVERED)


if __name__ == "__main__":
    main()

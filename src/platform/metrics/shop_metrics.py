from prometheus_client import Counter, Histogram


class ShopMetrics:
    """
    Shop Service Core Metrics Collector

    Tracks the cart reservation path: outcome per request and time spent
    inside the reservation transaction.
    """

    def __init__(self):
        # ========== Cart Reservation Business Metrics ==========
        self.cart_reservations = Counter(
            'cart_reservations_total',
            'Total cart reservation requests',
            ['result'],  # result: success/product_not_found/insufficient_stock/...
        )

        self.cart_reservation_duration = Histogram(
            'cart_reservation_duration_seconds',
            'Cart reservation processing time',
            ['result'],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

    # ========== Helper Methods ==========

    def record_cart_reservation(self, *, result: str, duration: float):
        self.cart_reservations.labels(result=result).inc()
        self.cart_reservation_duration.labels(result=result).observe(duration)


# Global metrics instance
metrics = ShopMetrics()

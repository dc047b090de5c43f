from functools import lru_cache
import logging

from redis import Redis

from app.core.config import settings
from app.application.ports.mailer import MailerPort
from app.application.ports.payment_gateway import PaymentGatewayPort
from app.application.ports.slot_store import SlotStorePort
from app.application.use_cases.admin_slots import AdminSlotsUseCase
from app.application.use_cases.reservation import ReservationUseCase
from app.application.use_cases.send_confirmation import SendConfirmationUseCase
from app.infrastructure.email.mock_mailer import MockMailer
from app.infrastructure.email.smtp_mailer import SmtpMailer
from app.infrastructure.payments.mock_gateway import MockPaymentGateway
from app.infrastructure.payments.stripe_gateway import StripeGateway
from app.infrastructure.store.json_store import JsonSlotStore
from app.infrastructure.store.memory_store import MemorySlotStore
from app.infrastructure.store.redis_store import RedisSlotStore


_slot_store: SlotStorePort | None = None


def _is_dev() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


def get_slot_store() -> SlotStorePort:
    global _slot_store
    if _slot_store is None:
        provider = settings.STORE_PROVIDER.lower()
        if provider == "redis":
            _slot_store = RedisSlotStore(
                Redis.from_url(settings.REDIS_URL, decode_responses=True),
                prefix=settings.REDIS_PREFIX,
            )
        elif provider == "memory":
            _slot_store = MemorySlotStore()
        elif provider == "json":
            _slot_store = JsonSlotStore(data_file=settings.DATA_FILE)
        else:
            raise ValueError(f"Unknown STORE_PROVIDER: {settings.STORE_PROVIDER}")
        logging.getLogger(__name__).info("Using slot store %s", type(_slot_store).__name__)
    return _slot_store


@lru_cache
def get_payment_gateway() -> PaymentGatewayPort:
    logger = logging.getLogger(__name__)
    if not settings.STRIPE_SECRET_KEY:
        if _is_dev():
            logger.info("Using MockPaymentGateway (STRIPE_SECRET_KEY missing, ENV=dev/local)")
            return MockPaymentGateway()
        raise ValueError("STRIPE_SECRET_KEY is required to create checkout sessions.")
    return StripeGateway(
        api_key=settings.STRIPE_SECRET_KEY,
        product_name=f"Acompte rendez-vous - {settings.BUSINESS_NAME}",
    )


@lru_cache
def get_mailer() -> MailerPort:
    if not settings.SMTP_USER or not settings.SMTP_PASSWORD:
        logging.getLogger(__name__).warning("SMTP credentials missing; confirmation emails are only logged")
        return MockMailer()
    return SmtpMailer(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        from_address=settings.MAIL_FROM,
    )


def get_reservation_use_case() -> ReservationUseCase:
    return ReservationUseCase(
        store=get_slot_store(),
        payment_gateway=get_payment_gateway(),
        notifier=SendConfirmationUseCase(
            mailer=get_mailer(),
            business_name=settings.BUSINESS_NAME,
            business_address=settings.BUSINESS_ADDRESS,
        ),
        frontend_url=settings.FRONTEND_URL,
        amount_minor_units=settings.DEPOSIT_AMOUNT_CENTS,
        currency=settings.DEPOSIT_CURRENCY,
    )


def get_admin_use_case() -> AdminSlotsUseCase:
    return AdminSlotsUseCase(store=get_slot_store(), admin_secret=settings.ADMIN_PASSWORD)

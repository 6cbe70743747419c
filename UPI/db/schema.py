"""
Database Schema
Tables, unique constraints and retention policy backing the UPI service.

Uniqueness of VPA addresses, transaction ids and mandate ids is enforced
here and nowhere else; the services rely on the insert failing.
"""

import logging

from db.database import db_manager

logger = logging.getLogger(__name__)

VPAS_TABLE = """
CREATE TABLE IF NOT EXISTS vpas (
    vpa_id BIGINT AUTO_INCREMENT PRIMARY KEY,
    account_key CHAR(32) NOT NULL,
    address VARCHAR(255) NOT NULL,
    linked_account_ref VARCHAR(64) NOT NULL DEFAULT '',
    is_default BOOLEAN NOT NULL DEFAULT TRUE,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    active_address VARCHAR(255) AS (IF(is_active, address, NULL)) STORED,
    created_at DATETIME(6) NOT NULL,
    updated_at DATETIME(6) NOT NULL,
    UNIQUE KEY uq_vpas_active_address (active_address),
    KEY idx_vpas_account_key (account_key)
)
"""

UPI_TRANSACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS upi_transactions (
    upi_txn_id BIGINT AUTO_INCREMENT PRIMARY KEY,
    account_key CHAR(32) NOT NULL,
    txn_id VARCHAR(64) NOT NULL,
    txn_type VARCHAR(16) NOT NULL,
    from_address VARCHAR(255) NOT NULL,
    to_address VARCHAR(255) NOT NULL,
    amount DECIMAL(15, 2) NOT NULL,
    note VARCHAR(255) NOT NULL DEFAULT '',
    status VARCHAR(16) NOT NULL,
    failure_reason VARCHAR(255) NULL,
    transaction_date DATETIME(6) NOT NULL,
    created_at DATETIME(6) NOT NULL,
    UNIQUE KEY uq_upi_transactions_txn_id (txn_id),
    KEY idx_upi_transactions_account_date (account_key, transaction_date DESC)
)
"""

MANDATES_TABLE = """
CREATE TABLE IF NOT EXISTS mandates (
    mandate_pk BIGINT AUTO_INCREMENT PRIMARY KEY,
    account_key CHAR(32) NOT NULL,
    mandate_id VARCHAR(64) NOT NULL,
    payer_address VARCHAR(255) NOT NULL,
    payee_address VARCHAR(255) NOT NULL,
    amount DECIMAL(15, 2) NOT NULL,
    frequency VARCHAR(32) NOT NULL,
    start_date DATETIME(6) NULL,
    end_date DATETIME(6) NULL,
    purpose VARCHAR(255) NOT NULL DEFAULT '',
    status VARCHAR(16) NOT NULL,
    created_at DATETIME(6) NOT NULL,
    updated_at DATETIME(6) NOT NULL,
    UNIQUE KEY uq_mandates_mandate_id (mandate_id),
    KEY idx_mandates_account_key (account_key)
)
"""

COLLECT_REQUESTS_TABLE = """
CREATE TABLE IF NOT EXISTS collect_requests (
    collect_id BIGINT AUTO_INCREMENT PRIMARY KEY,
    account_key CHAR(32) NOT NULL,
    from_address VARCHAR(255) NOT NULL,
    to_address VARCHAR(255) NOT NULL,
    amount DECIMAL(15, 2) NOT NULL,
    note VARCHAR(255) NOT NULL DEFAULT '',
    status VARCHAR(16) NOT NULL,
    expires_at DATETIME(6) NOT NULL,
    created_at DATETIME(6) NOT NULL,
    KEY idx_collect_requests_account_created (account_key, created_at DESC),
    KEY idx_collect_requests_expires_at (expires_at)
)
"""

# Expired collect requests are removed by the server, not by the application.
# The event keeps the creating session's UTC time_zone, matching expires_at.
COLLECT_REQUEST_RETENTION_EVENT = """
CREATE EVENT IF NOT EXISTS purge_expired_collect_requests
ON SCHEDULE EVERY 1 MINUTE
DO DELETE FROM collect_requests WHERE expires_at < NOW(6)
"""

SCHEMA_STATEMENTS = [
    VPAS_TABLE,
    UPI_TRANSACTIONS_TABLE,
    MANDATES_TABLE,
    COLLECT_REQUESTS_TABLE,
    COLLECT_REQUEST_RETENTION_EVENT,
]

def create_schema(db=None):
    """Create tables, unique indexes and the retention event if missing"""
    db = db or db_manager
    db.execute_script(SCHEMA_STATEMENTS)
    logger.info(f"Schema ensured ({len(SCHEMA_STATEMENTS)} statements)")

if __name__ == "__main__":
    create_schema()

"""
Database Configuration and Connection Management
Handles MySQL connection pooling and configuration for the UPI service
"""

from mysql.connector import pooling, Error
import os
import logging
import threading
from contextlib import contextmanager

# Configure logging
logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))
logger = logging.getLogger(__name__)

class DatabaseConfig:
    """Database configuration management"""

    def __init__(self):
        self.config = {
            'host': os.getenv('DB_HOST', 'localhost'),
            'port': int(os.getenv('DB_PORT', 3306)),
            'database': os.getenv('DB_NAME', 'upi_db'),
            'user': os.getenv('DB_USER', 'root'),
            'password': os.getenv('DB_PASSWORD', ''),
            'charset': 'utf8mb4',
            'collation': 'utf8mb4_unicode_ci',
            'autocommit': False,
            # Bounds every storage call made through the pool
            'connection_timeout': int(os.getenv('DB_CONNECT_TIMEOUT', 10)),
            'pool_name': 'upi_pool',
            'pool_size': int(os.getenv('DB_POOL_SIZE', 10)),
            'pool_reset_session': True,
            # Timestamps are written as naive UTC; NOW() in the retention event must agree
            'time_zone': '+00:00'
        }

        self.connection_pool = None
        self._pool_lock = threading.Lock()

    def _initialize_pool(self):
        """Initialize connection pool once, even when sessions race for it"""
        with self._pool_lock:
            if self.connection_pool is not None:
                return
            try:
                self.connection_pool = pooling.MySQLConnectionPool(**self.config)
                logger.info("Database connection pool initialized successfully")
            except Error as e:
                logger.error(f"Error creating connection pool: {e}")
                raise

    def get_connection(self):
        """Get connection from pool, creating the pool on first use"""
        if self.connection_pool is None:
            self._initialize_pool()
        try:
            return self.connection_pool.get_connection()
        except Error as e:
            logger.error(f"Error getting connection from pool: {e}")
            raise

class DatabaseManager:
    """Database operations manager"""

    def __init__(self):
        self.db_config = DatabaseConfig()

    @contextmanager
    def get_connection(self):
        """Context manager for database connections"""
        connection = None
        try:
            connection = self.db_config.get_connection()
            yield connection
        except Error as e:
            if connection:
                connection.rollback()
            logger.error(f"Database error: {e}")
            raise
        finally:
            if connection and connection.is_connected():
                connection.close()

    def execute_query(self, query: str, params: tuple = None, fetch_one: bool = False, fetch_all: bool = False):
        """Execute a query and return results"""
        with self.get_connection() as connection:
            cursor = connection.cursor(dictionary=True)
            try:
                cursor.execute(query, params or ())

                if fetch_one:
                    return cursor.fetchone()
                elif fetch_all:
                    return cursor.fetchall()
                else:
                    connection.commit()
                    return cursor.lastrowid
            finally:
                cursor.close()

    def execute_script(self, statements: list):
        """Execute DDL statements in order, committing once at the end"""
        with self.get_connection() as connection:
            cursor = connection.cursor()
            try:
                for statement in statements:
                    cursor.execute(statement)
                connection.commit()
            finally:
                cursor.close()

# Global database manager instance
db_manager = DatabaseManager()

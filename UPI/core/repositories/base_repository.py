"""
Base Repository Class
Provides common database operations for all repositories
"""

from abc import ABC
from typing import List, Optional, Dict, Any
import logging
from mysql.connector import Error, errorcode

from db.database import db_manager
from utils.exceptions import DatabaseException, DuplicateRecordException, ValidationException

logger = logging.getLogger(__name__)

class BaseRepository(ABC):
    """Base repository with common CRUD operations"""

    def __init__(self, table_name: str, primary_key: str = 'id', db=None):
        self.table_name = table_name
        self.primary_key = primary_key
        self.db = db or db_manager

    def create(self, data: Dict[str, Any]) -> int:
        """Create a new record, relying on the table's unique keys for duplicates"""
        try:
            clean_data = {
                k: v for k, v in data.items()
                if v is not None and k != self.primary_key
            }

            if not clean_data:
                raise ValidationException("No data provided for creation")

            columns = ', '.join(clean_data.keys())
            placeholders = ', '.join(['%s'] * len(clean_data))
            values = tuple(clean_data.values())

            query = f"INSERT INTO {self.table_name} ({columns}) VALUES ({placeholders})"

            result = self.db.execute_query(query, values)
            logger.info(f"Created record in {self.table_name} with ID: {result}")
            return result

        except Error as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                logger.warning(f"Duplicate key in {self.table_name}: {e.msg}")
                raise DuplicateRecordException(f"Duplicate record in {self.table_name}: {e.msg}")
            logger.error(f"Error creating record in {self.table_name}: {e}")
            raise DatabaseException(f"Failed to create record: {str(e)}")

    def find_where(self, where_clause: str, params: tuple, order_by: str = None,
                   limit: int = None, offset: int = 0) -> List[Dict[str, Any]]:
        """Find records matching a where clause with optional ordering and pagination"""
        try:
            query = f"SELECT * FROM {self.table_name} WHERE {where_clause}"
            if order_by:
                query += f" ORDER BY {order_by}"
            if limit:
                query += " LIMIT %s OFFSET %s"
                params = tuple(params) + (limit, offset)

            result = self.db.execute_query(query, params, fetch_all=True)
            return result or []

        except Error as e:
            logger.error(f"Error querying {self.table_name}: {e}")
            raise DatabaseException(f"Failed to find records: {str(e)}")

    def count(self, where_clause: str = None, params: tuple = None) -> int:
        """Count records with optional where clause"""
        try:
            query = f"SELECT COUNT(*) as count FROM {self.table_name}"
            if where_clause:
                query += f" WHERE {where_clause}"

            result = self.db.execute_query(query, params, fetch_one=True)
            return result['count'] if result else 0

        except Error as e:
            logger.error(f"Error counting records in {self.table_name}: {e}")
            raise DatabaseException(f"Failed to count records: {str(e)}")

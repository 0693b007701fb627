"""DynamoDB-backed record store for user email records."""

from __future__ import annotations

from typing import Any, Dict, Optional

import boto3
import structlog
from botocore.exceptions import ClientError

from onboarding.core.record_store import RecordStore
from onboarding.exceptions import UpstreamError
from onboarding.models import UserRecord

log = structlog.get_logger()


def _to_attributes(item: Dict[str, str]) -> Dict[str, Dict[str, str]]:
    return {key: {"S": value} for key, value in item.items()}


def _from_attributes(attributes: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    return {key: value.get("S") for key, value in attributes.items()}


class DynamoDBRecordStore(RecordStore):
    """
    Stores user records in a DynamoDB table.

    Expects table schema:
    - PK: userId (String, HASH)
    - Attributes: email, createdAt, updatedAt (all String)

    Requires AWS credentials with dynamodb:GetItem, dynamodb:PutItem and
    dynamodb:UpdateItem permissions.

    Example:
        store = DynamoDBRecordStore(
            table_name="UserEmailTable",
            region="us-east-1"
        )
        record = store.get_user("user1")
    """

    def __init__(
        self,
        table_name: str,
        region: str,
        endpoint_url: Optional[str] = None,  # For LocalStack testing
        client: Any = None,
    ):
        """Initialize DynamoDB record store.

        Args:
            table_name: Name of the DynamoDB table containing user records
            region: AWS region where the table is located
            endpoint_url: Optional endpoint URL for LocalStack/testing
            client: Optional pre-built boto3 DynamoDB client
        """
        self._table_name = table_name
        self._region = region
        self._dynamodb = client or boto3.client(
            "dynamodb",
            region_name=region,
            endpoint_url=endpoint_url
        )
        log.debug("Initialized DynamoDB record store", table_name=table_name, region=region)

    @property
    def table_name(self) -> str:
        return self._table_name

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        try:
            response = self._dynamodb.get_item(
                TableName=self._table_name,
                Key={"userId": {"S": user_id}}
            )
        except ClientError as e:
            log.error(
                "DynamoDB get_item failed",
                table_name=self._table_name,
                user_id=user_id,
                error=str(e)
            )
            raise UpstreamError(
                f"Failed to read user '{user_id}' from DynamoDB: {e}",
                operation="get_item",
            ) from e

        if "Item" not in response:
            log.debug("User record not found", user_id=user_id)
            return None

        return UserRecord.from_item(_from_attributes(response["Item"]))

    def put_user(self, record: UserRecord) -> None:
        try:
            self._dynamodb.put_item(
                TableName=self._table_name,
                Item=_to_attributes(record.to_item())
            )
        except ClientError as e:
            log.error(
                "DynamoDB put_item failed",
                table_name=self._table_name,
                user_id=record.user_id,
                error=str(e)
            )
            raise UpstreamError(
                f"Failed to store user '{record.user_id}' in DynamoDB: {e}",
                operation="put_item",
            ) from e

        log.info("Stored user record", table_name=self._table_name, user_id=record.user_id)

    def update_email(self, user_id: str, email: str, updated_at: str) -> UserRecord:
        try:
            response = self._dynamodb.update_item(
                TableName=self._table_name,
                Key={"userId": {"S": user_id}},
                UpdateExpression="SET email = :e, updatedAt = :d",
                ExpressionAttributeValues={
                    ":e": {"S": email},
                    ":d": {"S": updated_at}
                },
                ReturnValues="ALL_NEW"
            )
        except ClientError as e:
            log.error(
                "DynamoDB update_item failed",
                table_name=self._table_name,
                user_id=user_id,
                error=str(e)
            )
            raise UpstreamError(
                f"Failed to update email for user '{user_id}' in DynamoDB: {e}",
                operation="update_item",
            ) from e

        attributes = _from_attributes(response.get("Attributes", {}))
        attributes.setdefault("userId", user_id)
        log.info("Updated user email", table_name=self._table_name, user_id=user_id)
        return UserRecord.from_item(attributes)

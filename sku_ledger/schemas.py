from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """
    Defines the data contract for a single row of a transaction batch file.
    A 'receive' row is a purchase into stock, a 'sell' row is a sale request.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    action: Literal["receive", "sell"] = Field(..., alias="Action")
    sku: str = Field(..., min_length=1, alias="SKU")
    quantity: int = Field(..., ge=0, alias="Quantity")
    price: float = Field(..., allow_inf_nan=False, alias="Price")


class ItemSummary(BaseModel):
    """
    Defines the data contract for one SKU in the summary report.
    Aliases are the column names used in the exported CSV/JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    sku: str = Field(..., alias="SKU")
    units_sold: int = Field(default=0, ge=0, alias="Units Sold")
    # Can be negative when overselling is allowed.
    units_in_stock: int = Field(default=0, alias="Units In Stock")
    profit: float = Field(default=0.0, alias="Profit")
    unsold_cost: float = Field(default=0.0, alias="Unsold Cost")

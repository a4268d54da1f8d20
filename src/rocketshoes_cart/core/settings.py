
"""Configurações Pydantic Settings para o carrinho."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    """Configurações do carrinho. Carrega de env e .env (prefixo RS_)."""
    model_config = SettingsConfigDict(env_file=".env", env_prefix="RS_", case_sensitive=False)

    # Inventário (API de estoque/produtos)
    inventory_base_url: str = Field(default="http://localhost:3333", description="URL base da API de estoque e produtos")
    inventory_timeout_s: float = Field(default=10)

    # Persistência
    database_url: str = Field(default="sqlite:///rocketshoes_cart.db", description="URL SQLAlchemy do armazenamento do carrinho")
    cart_namespace_key: str = Field(default="@RocketShoes:cart")

    # Logs
    log_level: int = Field(default=20)

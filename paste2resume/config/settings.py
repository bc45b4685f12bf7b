"""
Configuration settings management with environment variable support.
"""

import json
from typing import List, Optional
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings
from dotenv import load_dotenv


# Load environment variables
load_dotenv()


class AISettings(BaseModel):
    """AI model settings for the two prompting steps."""
    extraction_model: str = "gpt-4o-mini"
    generation_model: str = "gpt-4o-mini"
    extraction_temperature: float = 0.0
    generation_temperature: float = 0.2
    max_tokens: int = 4000
    # Ollama model used when the hosted provider has no API key; None disables it
    fallback_model: Optional[str] = "llama3.1"


class RenderSettings(BaseModel):
    """Headless browser settings for HTML to PDF conversion."""
    page_format: str = "A4"
    margin: str = "0.5in"
    timeout_ms: int = 30000
    wait_until: str = "networkidle"
    print_background: bool = True
    headless: bool = True
    # Custom Chromium build, e.g. a serverless-friendly binary
    executable_path: Optional[str] = None
    browser_args: List[str] = Field(default_factory=lambda: [
        "--hide-scrollbars",
        "--disable-web-security",
        "--no-sandbox",
        "--disable-setuid-sandbox",
    ])


class Settings(BaseSettings):
    """Main application settings."""
    
    ai_settings: AISettings = Field(default_factory=AISettings)
    render_settings: RenderSettings = Field(default_factory=RenderSettings)
    
    # Application settings from environment
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 5000
    save_debug_artifacts: bool = False
    max_content_length: int = 1024 * 1024
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"
        case_sensitive = False
        extra = "ignore"
    
    @classmethod
    def from_json(cls, config_path: str = "config.json") -> "Settings":
        """
        Load settings from JSON configuration file.
        
        Args:
            config_path: Path to JSON configuration file
            
        Returns:
            Settings instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            
            return cls(**config_data)
            
        except FileNotFoundError:
            raise FileNotFoundError(
                f"❌ Config file not found: {config_path}\n"
                "   Create it or configure the app through environment variables"
            )
        except json.JSONDecodeError as e:
            raise ValueError(f"❌ Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ValueError(f"❌ Invalid configuration: {e}")


@lru_cache()
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.
    
    Args:
        config_path: Optional JSON configuration file; environment only when omitted
        
    Returns:
        Settings instance (cached)
    """
    if config_path:
        return Settings.from_json(config_path)
    return Settings()

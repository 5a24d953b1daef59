from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, Dict, Any


# --- Objets Mailgun ---
# extra="allow" : les champs ajoutés côté serveur sont conservés sans casser la validation.

class MailingList(BaseModel):
    """Liste de diffusion Mailgun"""
    address: str                    = Field(..., description="Adresse de la liste (ex: ml@example.com)")
    name: Optional[str]             = Field(None, description="Nom de la liste")
    description: Optional[str]      = Field(None, description="Description libre")
    access_level: Optional[str]     = Field(None, description="readonly (défaut), members ou everyone")
    reply_preference: Optional[str] = Field(None, description="list ou sender")
    members_count: Optional[int]    = Field(None, description="Nombre de membres")
    created_at: Optional[str]       = Field(None, description="Date de création (format RFC 2822)")

    model_config = ConfigDict(extra="allow")


class ListMember(BaseModel):
    """Membre d'une liste de diffusion"""
    address: str                        = Field(..., description="Adresse du membre")
    name: Optional[str]                 = Field(None, description="Nom du membre")
    subscribed: Optional[bool]          = Field(None, description="Abonné ou non")
    vars: Optional[Dict[str, Any]]      = Field(None, description="Paramètres libres du membre")

    model_config = ConfigDict(extra="allow")


# --- Réponses des endpoints ---

class MessageResponse(BaseModel):
    """Réponse de l'envoi d'un message"""
    id: Optional[str]   = Field(None, description="Identifiant du message (<...@domain>)")
    message: str        = Field(..., description="Statut retourné par l'API (ex: 'Queued. Thank you.')")

    model_config = ConfigDict(extra="allow")


class MailingListResponse(BaseModel):
    """Réponse d'une création / mise à jour de liste"""
    message: str                    = Field(..., description="Statut retourné par l'API")
    list: Optional[MailingList]     = Field(None, description="La liste après l'opération")

    model_config = ConfigDict(extra="allow")


class ListMemberResponse(BaseModel):
    """Réponse d'une création / mise à jour de membre"""
    message: str                    = Field(..., description="Statut retourné par l'API")
    member: Optional[ListMember]    = Field(None, description="Le membre après l'opération")

    model_config = ConfigDict(extra="allow")


class DeleteResponse(BaseModel):
    """Réponse d'une suppression (liste ou membre)"""
    message: str                    = Field(..., description="Statut retourné par l'API")
    address: Optional[str]          = Field(None, description="Adresse de la liste supprimée")
    member: Optional[Dict[str, Any]] = Field(None, description="Membre supprimé ({'address': ...})")

    model_config = ConfigDict(extra="allow")

import uuid
from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, Boolean, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = (UniqueConstraint("chat_id", "position", name="uq_messages_chat_position"),)
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    chat_id = Column(Uuid(as_uuid=True), ForeignKey("chats.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(String(32), nullable=False)
    content = Column(Text, nullable=False)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    chat = relationship("Chat", back_populates="messages")


class Chat(Base):
    __tablename__ = "chats"
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    model = Column(String(255), nullable=False)
    quality = Column(String(16), nullable=False)
    prompt = Column(Text, nullable=False)
    title = Column(String(255), default="")
    shadcn = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    messages = relationship(
        "Message",
        back_populates="chat",
        order_by="Message.position",
        cascade="all, delete-orphan",
    )

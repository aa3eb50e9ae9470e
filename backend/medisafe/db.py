# backend/medisafe/db.py
from sqlalchemy import create_engine, Column, Integer, String, Boolean, JSON, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator, List
import datetime

from medisafe.config import settings
from medisafe.schemas import Medication

DATABASE_URL = settings.DATABASE_URL

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


class MedicationRecord(Base):
    __tablename__ = "medications"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    dosage = Column(String, default="")
    schedule = Column(JSON, default=list)  # minutes since midnight
    active = Column(Boolean, default=True)
    inventory = Column(JSON, default=dict)
    interactions = Column(JSON, default=list)
    dose_history = Column(JSON, default=list)  # ISO timestamps
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    def to_medication(self) -> Medication:
        return Medication(
            id=self.id,
            name=self.name,
            dosage=self.dosage or "",
            schedule=self.schedule or [],
            active=bool(self.active),
            inventory=self.inventory or {},
            interactions=self.interactions or [],
            dose_history=self.dose_history or [],
        )


class DismissedAlert(Base):
    __tablename__ = "dismissed_alerts"

    id = Column(Integer, primary_key=True, index=True)
    alert_id = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)


def init_db(bind=None) -> None:
    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def list_medications(db: Session, active_only: bool = True) -> List[Medication]:
    q = db.query(MedicationRecord)
    if active_only:
        q = q.filter(MedicationRecord.active.is_(True))
    return [r.to_medication() for r in q.order_by(MedicationRecord.id)]


def save_medication(db: Session, medication: Medication) -> MedicationRecord:
    """Insert or replace one medication; callers recompute alerts afterwards."""
    data = medication.model_dump(mode="json")
    record = db.get(MedicationRecord, medication.id)
    if record is None:
        record = MedicationRecord(id=medication.id)
        db.add(record)
    record.name = data["name"]
    record.dosage = data["dosage"]
    record.schedule = data["schedule"]
    record.active = data["active"]
    record.inventory = data["inventory"]
    record.interactions = data["interactions"]
    record.dose_history = data["dose_history"]
    db.commit()
    return record


def dismissed_alert_ids(db: Session) -> List[str]:
    return [r.alert_id for r in db.query(DismissedAlert).order_by(DismissedAlert.id)]


def dismiss_alert(db: Session, alert_id: str) -> None:
    if db.query(DismissedAlert).filter(DismissedAlert.alert_id == alert_id).first():
        return
    db.add(DismissedAlert(alert_id=alert_id))
    db.commit()


def prune_dismissed_alerts(db: Session, live_ids) -> int:
    """Forget dismissals whose condition is gone, so a recurrence alerts again."""
    live_ids = set(live_ids)
    stale = [r for r in db.query(DismissedAlert) if r.alert_id not in live_ids]
    for r in stale:
        db.delete(r)
    if stale:
        db.commit()
    return len(stale)

# /lugyi_admin/services/database_helpers/announce_repository_sql.py

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from lugyi_admin.db.models.announce_models import Announce


class AnnounceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_all_announces(self) -> List[Announce]:
        """Retrieves every announcement in insertion order."""
        return self.db.query(Announce).order_by(Announce.id).all()

    def get_announce_by_id(self, announce_id: int) -> Optional[Announce]:
        return self.db.query(Announce).filter(Announce.id == announce_id).first()

    def add_announce(self, record: Dict) -> Announce:
        """Creates a new Announce record in the database from a dictionary."""
        new_announce = Announce(**record)
        self.db.add(new_announce)
        self.db.commit()
        self.db.refresh(new_announce)
        return new_announce

    def update_announce(self, announce_id: int, data: Dict) -> Optional[Announce]:
        db_announce = self.get_announce_by_id(announce_id)
        if db_announce:
            for key, value in data.items():
                setattr(db_announce, key, value)
            self.db.commit()
            self.db.refresh(db_announce)
        return db_announce

    def delete_announce(self, announce_id: int) -> bool:
        """Deletes a single announcement by its ID."""
        db_announce = self.get_announce_by_id(announce_id)
        if db_announce:
            self.db.delete(db_announce)
            self.db.commit()
            return True
        return False

"""
Clearance models
"""

from school_clearance.models.student import db

class Department(db.Model):
    """Administrative office that must sign off on a student"""
    __tablename__ = 'departments'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    officer_name = db.Column(db.String(200), nullable=False)
    officer_title = db.Column(db.String(200), nullable=False)
    
    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'officer_name': self.officer_name,
            'officer_title': self.officer_title
        }


class ClearanceItem(db.Model):
    """Checklist entry shown to a department officer"""
    __tablename__ = 'clearance_items'
    
    id = db.Column(db.Integer, primary_key=True)
    # No foreign key: the department cascade is done by the service
    department_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    
    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'department_id': self.department_id,
            'name': self.name,
            'description': self.description
        }


class StudentClearance(db.Model):
    """Per-student clearance record with embedded department decisions"""
    __tablename__ = 'student_clearances'
    
    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, nullable=False, index=True)
    academic_year = db.Column(db.String(20), nullable=False)
    department_clearances = db.Column(db.JSON, nullable=False, default=list)
    
    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'student_id': self.student_id,
            'academic_year': self.academic_year,
            'department_clearances': list(self.department_clearances or [])
        }
